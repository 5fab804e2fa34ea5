from opentelemetry import trace
from opentelemetry.trace import NonRecordingSpan, SpanContext, TraceFlags

from ampy_diag import diag, init, shutdown

def main():
    init()
    ctx = SpanContext(trace_id=0x4BF92F3577B34DA6A3CE929D0E0E4736, span_id=0x00F067AA0BA902B7,
                      is_remote=True, trace_flags=TraceFlags(TraceFlags.SAMPLED))
    with trace.use_span(NonRecordingSpan(ctx)):
        diag.info("inside span")  # carries trace_id / span_id
    diag.info("outside span")
    shutdown()

if __name__ == "__main__":
    main()
