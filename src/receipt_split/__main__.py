import sys

from receipt_split.cli import main

sys.exit(main())
