from htmlsync.cli import main

main()
