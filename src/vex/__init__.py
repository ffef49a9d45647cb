"""vex: evaluator and function analyzer for the vex expression language.

Entry points::

    from vex.evaluate import evaluate
    from vex.analysis import analyze

    result = evaluate(program)
    result.value, result.variables

    for info in analyze(program):
        print(info.name, info.is_recursive)
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
