import sys

from sphere_tracer.main import main

if __name__ == "__main__":
    sys.exit(main())
