import sys

from cmpbench.bench.runner import main

sys.exit(main())
