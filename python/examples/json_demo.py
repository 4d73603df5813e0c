import json
from chatty import Config, Emitter, OutputFormat, Severity

def main():
    log = Emitter(Config(severity=Severity.DEBUG, output_format=OutputFormat.JSON))
    log.info("orders synced", count=42, venue="alpaca", dry_run=False)

    # Fast path: quotes in text are not escaped, so this line is not valid JSON.
    log.warn('symbol "AAPL" halted')

    log.set_escape_json(True)
    log.warn('symbol "AAPL" halted', reason="LULD pause")
    rec = json.loads(log.last_record())
    print("parsed back:", rec["msg"], rec["details"])

if __name__ == "__main__":
    main()
