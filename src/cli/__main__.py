import sys

from src.cli.demo import main

sys.exit(main())
