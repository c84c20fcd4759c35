import sys

from docxscan.cli import main

sys.exit(main())
