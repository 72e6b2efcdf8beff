from chunkhunter.cli import main

main()
