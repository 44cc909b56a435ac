from dupes.cli import main

main()
