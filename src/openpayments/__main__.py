import sys

from openpayments.main import main

sys.exit(main())
