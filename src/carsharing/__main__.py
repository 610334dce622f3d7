from carsharing.cli import main

raise SystemExit(main())
