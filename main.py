"""主程序入口 - 命令行求值与交互式REPL"""
import argparse
import logging

from config.config import LOGGING_CONFIG, DATA_CONFIG, SESSION_CONFIG, validate_config
from core import ExpressionEvaluator
from core.errors import EvalError
from data.store import SessionStore
from session import CalculatorSession
from utils.benchmark import run_benchmark

logger = logging.getLogger(__name__)

PROMPT = ">> "
EXIT_COMMANDS = ("exit", "quit")


def run_repl(session):
    """逐行读取输入直到 EOF / exit / quit"""
    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if line.strip().lower() in EXIT_COMMANDS:
            break

        response = session.execute(line)
        if response is not None:
            print(response)


def print_rpn(evaluator, expressions):
    for expression in expressions:
        try:
            print(evaluator.to_rpn(expression))
        except EvalError as e:
            print(e)


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    evaluator = ExpressionEvaluator()

    if args.benchmark:
        avg_ms = run_benchmark(evaluator, iterations=args.iterations)
        print(f"Performance test result: {avg_ms:.4f} milliseconds on average for each evaluation")
        return

    if args.rpn:
        print_rpn(evaluator, args.expressions)
        return

    session = CalculatorSession(evaluator, precision=args.precision)

    store = None if args.no_persist else SessionStore(args.state_dir)
    if store is not None:
        history, variables = store.load()
        session.restore(history, variables)

    try:
        if args.expressions:
            for line in args.expressions:
                response = session.execute(line)
                if response is not None:
                    print(response)
        else:
            run_repl(session)
    finally:
        if store is not None:
            store.save(session.history, evaluator.variables)


def build_parser():
    parser = argparse.ArgumentParser(description="Mathics expression calculator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Lines to execute (expressions, name=expression or keywords); starts a REPL when omitted"
    )
    parser.add_argument(
        "--state_dir",
        type=str,
        default=DATA_CONFIG['state_dir'],
        help="Directory holding history.csv and variables.csv"
    )
    parser.add_argument(
        "--no_persist",
        action="store_true",
        help="Do not load or save history and variables"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=SESSION_CONFIG['precision'],
        choices=range(SESSION_CONFIG['min_precision'], SESSION_CONFIG['max_precision'] + 1),
        metavar="N",
        help="Decimal places shown for results (default: %(default)s)"
    )
    parser.add_argument(
        "--rpn",
        action="store_true",
        help="Print the postfix form of each expression instead of evaluating it"
    )
    parser.add_argument(
        "--benchmark",
        action="store_true",
        help="Run the performance test and exit"
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=None,
        help="Benchmark rounds (default from config)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def run():
    main(build_parser().parse_args())


if __name__ == "__main__":
    run()
