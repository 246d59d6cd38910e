from britto.launcher.cli import main

raise SystemExit(main())
