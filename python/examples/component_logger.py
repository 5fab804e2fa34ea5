from ampy_diag import ComponentLoggerOptions, DiagLogLevel, diag, init, shutdown

def main():
    init(DiagLogLevel.DEBUG)
    log = diag.create_component_logger(ComponentLoggerOptions(namespace="ampy.bus"))
    log.debug("subscribed", "ampy/dev/bars/v1")
    log.verbose("dropped at DEBUG")
    shutdown()
    log.error("nobody hears this")

if __name__ == "__main__":
    main()
