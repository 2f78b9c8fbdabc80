import sys

from kanbanify.cli import main

sys.exit(main())
