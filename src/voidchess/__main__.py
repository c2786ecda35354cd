from voidchess.app import main

main()
