# Entry point for running the benchmarks from a source checkout:
#   python benchmark.py hdfs <localPath> <remotePath> <count> <true|false>
#   python benchmark.py [--use-alternate-transport] [--runs N] gs://bucket/object

import sys
from src.storage_bench.cli import hdfs_main, write_main


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "hdfs":
        sys.exit(hdfs_main(sys.argv[2:]))
    sys.exit(write_main(sys.argv[1:]))
