from SearchBox.cli import main

main()
