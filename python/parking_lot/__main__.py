from parking_lot.cli import main

raise SystemExit(main())
