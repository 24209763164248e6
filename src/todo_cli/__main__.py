from todo_cli.cli.main import main

main()
