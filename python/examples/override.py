import logging

from ampy_diag import DiagLoggerOptions, DiagLogLevel, diag, init
from ampy_diag.logging import StdlibDiagLogger

def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    init(DiagLogLevel.INFO)
    # Both loggers get a warning naming this call site.
    diag.set_logger(StdlibDiagLogger("demo"), DiagLoggerOptions(log_level=DiagLogLevel.WARN))
    diag.info("filtered")
    diag.warn("shown via stdlib logging")
    print("self install accepted:", diag.set_logger(diag))

if __name__ == "__main__":
    main()
