from lookupingress.cli import main

main()
