import argparse
import logging
import sys

import numpy as np

from . import __version__
from .baseline import compare, format_comparison
from .config import KMeansConfig
from .datasets import make_dataset, write_points
from .engine import DEFAULT_MAX_ITER, KMeans
from .errors import ConfigError, DataError, OutputError
from .io import format_console, read_records, save_results
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT = 1
EXIT_OUTPUT = 2


def cmd_run(args):
    config = KMeansConfig.from_args(args)
    engine = KMeans(config.k, max_iter=config.max_iter)
    engine.load(config.input_path, strict=config.strict)
    engine.initialize()
    engine.run()

    print(format_console(engine.points, engine.groups))
    if config.output_path:
        save_results(config.output_path, engine.points)
    return EXIT_OK


def cmd_gen(args):
    data, _ = make_dataset(args.n, args.k, seed=args.seed)
    write_points(args.output, data)
    return EXIT_OK


def cmd_baseline(args):
    records = read_records(args.input, strict=args.strict)
    runs, agree = compare(records, args.k, max_iter=args.max_iter)
    print(format_comparison(runs, agree))
    return EXIT_OK


def cmd_plot(args):
    # only this command needs matplotlib
    from .plot import plot_result, read_result_table

    records = read_records(args.input)
    coords = {index: (x, y) for index, x, y in records}
    ids, _, labels = read_result_table(args.result)
    missing = [i for i in ids if i not in coords]
    if missing:
        raise DataError('Result rows %s are not in %s' % (missing[:5], args.input))
    data = np.array([coords[i] for i in ids])
    plot_result(data, labels, save=args.save, show=not args.save)
    return EXIT_OK


def build_parser():
    parser = argparse.ArgumentParser(prog='kmeans2d', description="Lloyd's K-means for 2D points")
    parser.add_argument('--version', action='version', version='%(prog)s ' + __version__)
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='-v for progress, -vv for per-iteration detail')
    parser.add_argument('--log-file', type=str, default=None, help='Also write logs to this file')
    sub = parser.add_subparsers(dest='command', required=True)

    run = sub.add_parser('run', help='Cluster a point file')
    run.add_argument('input', help='File of "<index> <x> <y>" records')
    run.add_argument('-k', '--clusters', dest='k', type=int, required=True, help='Number of clusters')
    run.add_argument('-o', '--output', type=str, default=None, help='Write the result table here')
    run.add_argument('-m', '--max-iter', type=int, default=DEFAULT_MAX_ITER,
                     help='Maximum number of iterations')
    run.add_argument('--strict', action='store_true', help='Reject malformed records')
    run.set_defaults(func=cmd_run)

    gen = sub.add_parser('gen', help='Generate a synthetic point file')
    gen.add_argument('n', type=int, help='Number of points')
    gen.add_argument('k', type=int, help='Number of blobs')
    gen.add_argument('output', help='File to write')
    gen.add_argument('--seed', type=int, default=None)
    gen.set_defaults(func=cmd_gen)

    baseline = sub.add_parser('baseline', help='Time against scikit-learn and scipy')
    baseline.add_argument('input')
    baseline.add_argument('-k', '--clusters', dest='k', type=int, required=True)
    baseline.add_argument('-m', '--max-iter', type=int, default=DEFAULT_MAX_ITER)
    baseline.add_argument('--strict', action='store_true')
    baseline.set_defaults(func=cmd_baseline)

    plot = sub.add_parser('plot', help='Scatter plot a saved result table')
    plot.add_argument('input', help='The point file that was clustered')
    plot.add_argument('result', help='Result table written by "run -o"')
    plot.add_argument('--save', type=str, default=None, help='Save the figure instead of showing it')
    plot.set_defaults(func=cmd_plot)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    setup_logging(level, args.log_file)

    try:
        return args.func(args)
    except (ConfigError, DataError) as e:
        logger.error('Error: %s', e)
        return EXIT_INPUT
    except OutputError as e:
        logger.error('Error: %s', e)
        return EXIT_OUTPUT


if __name__ == '__main__':
    sys.exit(main())
