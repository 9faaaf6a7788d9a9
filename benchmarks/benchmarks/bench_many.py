from pympc.Char import digits
from pympc.Combinators import many, or_, sep_by
from pympc.Eval import run_parser
from pympc.Fold import count_fold
from pympc.Prim import char, string


class TimeMany:
    def setup(self):
        self.parser = many(char("a"), count_fold)
        self.small = "a" * 1000
        self.medium = "a" * 10000
        self.large = "a" * 100000

    def time_many_small(self):
        run_parser(self.parser, self.small)

    def time_many_medium(self):
        run_parser(self.parser, self.medium)

    def time_many_large(self):
        run_parser(self.parser, self.large)


class TimeSepBy:
    def setup(self):
        self.parser = sep_by(digits(), char(","), count_fold)
        self.text = ",".join(str(i) for i in range(20000))

    def time_sep_by(self):
        run_parser(self.parser, self.text)


class TimeBacktracking:
    def setup(self):
        keywords = ["while", "where", "when", "whence", "whatever"]
        self.parser = many(or_([string(k) for k in keywords]), count_fold)
        self.text = "whatever" * 5000

    def time_or_backtracking(self):
        run_parser(self.parser, self.text)
