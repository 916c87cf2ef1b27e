import sys

from atomscript.repl import main

sys.exit(main())
