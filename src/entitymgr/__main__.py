from entitymgr.cli.main import main

main()
