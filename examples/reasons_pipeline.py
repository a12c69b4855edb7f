from optionpy import ConsoleLogger, some_with_reason, none_with_reason


def parse_port(raw: str):
    if not raw.isdigit():
        return none_with_reason(f"not a number: {raw!r}")
    return some_with_reason(int(raw))


def main():
    log = ConsoleLogger(level="DEBUG")
    for raw in ["8080", "http", "70000"]:
        port = (
            parse_port(raw)
            .filter(lambda p: 0 < p < 65536, f"out of range: {raw}")
            .traced("port", log)
        )
        print(port.match(lambda p: f"listening on {p}", lambda why: f"skipped ({why})"))
    print(parse_port("x").map_reason(len).drop_reason())    # None


if __name__ == "__main__":
    main()
