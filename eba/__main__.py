from eba.cli.app import main

main()
