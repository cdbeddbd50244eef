from pptx2text.cli import main

raise SystemExit(main())
