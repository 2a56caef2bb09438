import sys

from comma_sort.cli import main

sys.exit(main())
