import argparse
import logging
import threading

from src.core.extlog.log_severity import parse_severity
from src.core.extlog.logger_config import LoggerConfig, build_extended_logger


def main() -> None:
    parser = argparse.ArgumentParser(description="Emit thread-annotated debug logs from worker threads.")
    parser.add_argument("--name", default="demo.extlog")
    parser.add_argument("--level", default="FINE", help="Logger threshold (e.g. FINEST, FINE, INFO)")
    parser.add_argument("--debug-level", default="FINE", help="Level used for debug_log()")
    parser.add_argument("--jsonl", default=None, help="Optional JSONL output path")
    parser.add_argument("--workers", type=int, default=3)
    args = parser.parse_args()

    logging.basicConfig(format="%(asctime)s %(levelname)-7s %(name)s: %(message)s", level=parse_severity(args.level))

    ext = build_extended_logger(
        LoggerConfig.from_dict(
            {
                "name": args.name,
                "level": args.level,
                "debug_level": args.debug_level,
                "jsonl_path": args.jsonl,
            }
        )
    )
    print(ext)
    print("debug loggable:", ext.is_debug_loggable())

    def work(n: int) -> None:
        ext.debug_log("task {0} of {1}", n, args.workers)

    threads = [threading.Thread(target=work, args=(i + 1,), name=f"worker-{i + 1}") for i in range(args.workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ext.debug_log("done")


if __name__ == "__main__":
    main()
