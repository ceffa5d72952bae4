from word_replacer.cli import main

raise SystemExit(main())
