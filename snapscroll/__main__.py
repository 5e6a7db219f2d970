from snapscroll.cli import main

raise SystemExit(main())
