from cpdl.cli import main

raise SystemExit(main())
