from minride_data.app.main import main

raise SystemExit(main())
