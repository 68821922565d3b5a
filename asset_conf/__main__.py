from asset_conf.cli import main

raise SystemExit(main())
