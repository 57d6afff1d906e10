from chaincalc.console import main

main()
