from .picker_cli import main

main()
