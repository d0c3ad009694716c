import sys

from labelpp.cli import main

sys.exit(main())
