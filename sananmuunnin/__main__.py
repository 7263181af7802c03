from sananmuunnin.app.cli import main

raise SystemExit(main())
