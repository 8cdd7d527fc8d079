from gridcells.cli import main

raise SystemExit(main())
