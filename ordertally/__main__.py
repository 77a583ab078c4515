import sys

from ordertally.cli.main import main

sys.exit(main())
