from storecart.cli import main

main()
