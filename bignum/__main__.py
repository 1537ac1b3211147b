import sys

from bignum.calculator.cli import main

sys.exit(main())
