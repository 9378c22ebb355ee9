"""Command-line front-end: runs the demonstration problems and prints results or JSON reports."""

import argparse
import logging
import sys

from nmkit.core.errors import NumericalError
from nmkit.io.json_export import (
    dumps,
    gauss_report,
    iterative_report,
    newton_systems_report,
    rootfinding_report,
)
from nmkit.problems import gauss_problem, iterative_problem, nonlinear_problem, scalar_problem

logger = logging.getLogger(__name__)

_SYSTEM_IDS = (1, 2, 3, 4)


def _fmt_vector(values) -> str:
    return "[" + ", ".join(f"{v:.6g}" for v in values) + "]"


def _common_flags() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Print a JSON report")
    trace = common.add_mutually_exclusive_group()
    trace.add_argument("--trace", dest="trace", action="store_true",
                       help="Include per-step traces in the JSON report")
    trace.add_argument("--no-trace", dest="trace", action="store_false")
    common.set_defaults(trace=False)
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return common


def build_parser() -> argparse.ArgumentParser:
    common = _common_flags()
    parser = argparse.ArgumentParser(prog="nmkit", description="Classical numerical methods")
    sub = parser.add_subparsers(dest="cmd")

    p_root = sub.add_parser("rootfinding", parents=[common],
                            help="Bisection, regula falsi, secant and Newton on one equation")
    p_root.add_argument("--eq", type=int, default=1, choices=_SYSTEM_IDS)
    p_root.add_argument("--interval", type=int, default=1, choices=(1, 2))
    p_root.add_argument("--a", type=float, help="Override the left endpoint")
    p_root.add_argument("--b", type=float, help="Override the right endpoint")
    p_root.add_argument("--x0", type=float, help="Newton start (default: midpoint)")
    p_root.add_argument("--eps", type=float, help="Tolerance (default: 1e-7)")

    p_gauss = sub.add_parser("gauss", parents=[common],
                             help="Gaussian elimination with 3 significant digits")
    p_gauss.add_argument("system", type=int, nargs="?", default=1, choices=_SYSTEM_IDS)

    p_iter = sub.add_parser("iterative", parents=[common],
                            help="Two Jacobi and Gauss-Seidel sweeps from zero")
    p_iter.add_argument("system", type=int, nargs="?", default=1, choices=_SYSTEM_IDS)

    p_newton = sub.add_parser("newton-systems", parents=[common],
                              help="Newton's method for a nonlinear system")
    p_newton.add_argument("system", type=int, nargs="?", default=4, choices=_SYSTEM_IDS)

    return parser


def _run_rootfinding(args, parser) -> None:
    problem = scalar_problem(args.eq, args.interval)
    a = problem.a if args.a is None else args.a
    b = problem.b if args.b is None else args.b
    if not a < b:
        parser.error("invalid interval: require a < b")
    if args.eq == 1 and (a <= 0.0 or b <= 0.0):
        parser.error("invalid interval for eq 1: require a > 0 and b > 0 because of ln(x)")

    report = rootfinding_report(problem, a=a, b=b, x0=args.x0, eps=args.eps,
                                trace=args.trace and args.json)
    if args.json:
        print(dumps(report))
        return
    print(f"Eq({report['eq']}), interval [{a:g}, {b:g}]")
    for method in report["methods"]:
        print(f"  {method['name']:<12} = {method['x']:.10g}")


def _run_gauss(args) -> None:
    report = gauss_report(gauss_problem(args.system), trace=args.trace and args.json)
    if args.json:
        print(dumps(report))
        return
    print(f"Solution x = {_fmt_vector(report['x'])}")


def _run_iterative(args) -> None:
    report = iterative_report(iterative_problem(args.system), trace=args.trace and args.json)
    if args.json:
        print(dumps(report))
        return
    labels = {"jacobi": "Jacobi", "gaussSeidel": "Gauss-Seidel"}
    for method in report["methods"]:
        print(f"{labels[method['name']]} x^({report['iterations']}) = {_fmt_vector(method['x'])}")


def _run_newton_systems(args) -> None:
    report = newton_systems_report(nonlinear_problem(args.system), trace=args.trace and args.json)
    if args.json:
        print(dumps(report))
        return
    print(f"Solution x = {_fmt_vector(report['x'])}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cmd is None:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "rootfinding":
            _run_rootfinding(args, parser)
        elif args.cmd == "gauss":
            _run_gauss(args)
        elif args.cmd == "iterative":
            _run_iterative(args)
        else:
            _run_newton_systems(args)
    except NumericalError as exc:
        logger.debug("%s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
