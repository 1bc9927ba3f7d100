from minigrep.cli import main

main()
