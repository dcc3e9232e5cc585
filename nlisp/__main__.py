import sys

from nlisp.repl import main

sys.exit(main())
