from adascan.cli import main

main()
