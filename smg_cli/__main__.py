from smg_cli.cli import main

main()
