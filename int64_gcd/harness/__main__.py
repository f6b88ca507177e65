import sys

from int64_gcd.harness.harness import main

sys.exit(main())
