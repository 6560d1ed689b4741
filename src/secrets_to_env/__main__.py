import sys

from secrets_to_env.cli import main

sys.exit(main())
