from .pygame_client import main

raise SystemExit(main())
