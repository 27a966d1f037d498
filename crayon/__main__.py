from crayon.cli import main

main()
