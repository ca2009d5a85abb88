import argparse
import json
import logging
from .core import OptionRequest, OptionSide, InvalidParameter
from .black_scholes import price_and_greeks

logger = logging.getLogger(__name__)

_QUIT = {"q", "quit"}

_PROMPTS = (
    ("spot", "Enter Stock price (S): "),
    ("strike", "Enter Strike price (K): "),
    ("time_to_expiry", "Enter Time to expiration (T): "),
    ("risk_free_rate", "Enter Risk-free interest rate (r): "),
    ("volatility", "Enter Volatility (sigma): "),
)


def _side(s: str):
    try:
        return OptionSide.parse(s)
    except ValueError:
        raise argparse.ArgumentTypeError("side must be 'call' or 'put'")


def _digits(s: str):
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"digits must be an integer, got {s!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"digits must be non-negative, got {n}")
    return n


# ---------------------------------------------------------------------------
# Interactive loop
# ---------------------------------------------------------------------------
def _ask_float(message, input_func):
    """Prompt until a number is entered; ``None`` means quit."""
    while True:
        text = input_func(message).strip()
        if text.lower() in _QUIT:
            return None
        try:
            return float(text)
        except ValueError:
            print("Invalid input. Please enter a valid double number.")


def _ask_side(message, input_func):
    while True:
        text = input_func(message).strip()
        if text.lower() in _QUIT:
            return None
        try:
            return OptionSide.parse(text)
        except ValueError:
            print("Invalid input. Please enter 'c' for call or 'p' for put.")


def repl(input_func=None, digits: int = 2) -> int:
    """Read a request, print its price and Greeks, repeat.

    Stops on end of input or when ``q``/``quit`` is typed at any prompt.
    """
    input_func = input_func or input
    try:
        while True:
            fields = {}
            for name, message in _PROMPTS:
                value = _ask_float(message, input_func)
                if value is None:
                    return 0
                fields[name] = value
            side = _ask_side("Enter Option type (c for call, p for put): ", input_func)
            if side is None:
                return 0

            try:
                req = OptionRequest(side=side, **fields)
            except InvalidParameter as e:
                logger.warning("rejected request %s: %s", fields, e)
                print(f"Invalid parameters: {e}\n")
                continue

            result = price_and_greeks(req)
            logger.debug("priced %s -> %s", req, result)
            print()
            print(result.format(digits))
            print()
    except EOFError:
        return 0


# ---------------------------------------------------------------------------
# One-shot pricing
# ---------------------------------------------------------------------------
def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--S", dest="spot", type=float, required=True)
    parser.add_argument("--K", dest="strike", type=float, required=True)
    parser.add_argument("--T", dest="time_to_expiry", type=float, required=True, help="years")
    parser.add_argument("--r", dest="risk_free_rate", type=float, required=True, help="cont. risk-free")
    parser.add_argument("--sigma", dest="volatility", type=float, required=True)
    parser.add_argument("--side", type=_side, default=OptionSide.CALL, help="call|put|c|p")


def cmd_price(args, parser):
    try:
        req = OptionRequest(args.spot, args.strike, args.time_to_expiry,
                            args.risk_free_rate, args.volatility, args.side)
    except InvalidParameter as e:
        logger.warning("rejected request: %s", e)
        parser.error(str(e))
    result = price_and_greeks(req)
    if args.json:
        print(json.dumps(result.as_dict()))
    else:
        print(result.format(args.digits))
    return 0


def main(argv=None):
    p = argparse.ArgumentParser(prog="bsgreeks", description="Black-Scholes price and Greeks")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--digits", type=_digits, default=2, help="decimals shown")
    sub = p.add_subparsers(dest="cmd")

    p_price = sub.add_parser("price", help="price one option and exit")
    add_common(p_price)
    p_price.add_argument("--json", action="store_true", help="print a JSON object")

    sub.add_parser("repl", help="interactive request/response loop (default)")

    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.cmd == "price":
        return cmd_price(args, p_price)
    return repl(digits=args.digits)


if __name__ == "__main__":
    raise SystemExit(main())
