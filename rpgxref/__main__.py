from rpgxref.cli import main

raise SystemExit(main())
