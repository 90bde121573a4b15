import argparse
import sys

from config import BotConfig
from pilot.protocol import format_decision, read_setup, read_turn
from pilot.race import RaceContext
from pilot.strategies.registry import STRATEGIES, build_strategy

class Bot:
    """
    Read-decide-print loop around a RaceContext.
    stdout carries the referee protocol, so all logging goes to stderr.
    """
    def __init__(self, config: BotConfig = None, stdin=None, stdout=None, logger_callback=None):
        self.config = config if config is not None else BotConfig()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.logger_callback = logger_callback
        self.race = None

    def log(self, msg):
        print(msg, file=sys.stderr)
        if self.logger_callback:
            self.logger_callback(msg)

    def setup(self) -> RaceContext:
        laps, checkpoints = read_setup(self.stdin.readline)
        self.race = RaceContext.setup(laps, checkpoints)
        strategies = [build_strategy(name, self.config) for name in self.config.strategy_names]
        self.race.bind_strategies(strategies)
        if self.config.verbose:
            self.log(f"Race: {laps} laps, {len(checkpoints)} checkpoints, strategies {self.config.strategy_names}")
        return self.race

    def play_turn(self):
        self.race.update(read_turn(self.stdin.readline))
        for pod, (target, action) in zip(self.race.my_pods, self.race.decide()):
            if self.config.verbose:
                self.log(f"T{self.race.turn} {pod!r} -> {target} {action}")
            print(format_decision(target, action), file=self.stdout, flush=True)

    def run(self) -> int:
        """Plays until the referee closes the stream. Returns turns played."""
        if self.race is None:
            self.setup()
        turns = 0
        while True:
            try:
                self.play_turn()
            except EOFError:
                break
            turns += 1
        if self.config.verbose:
            self.log(f"Input closed after {turns} turns")
        return turns

def main(argv=None):
    parser = argparse.ArgumentParser(description="Pod racing bot")
    parser.add_argument("--first", type=str, default="fly", choices=sorted(STRATEGIES), help="Strategy for pod 0")
    parser.add_argument("--second", type=str, default="block", choices=sorted(STRATEGIES), help="Strategy for pod 1")
    parser.add_argument("--boost-lap", type=int, default=0, help="Legacy strategy: don't boost before this lap")
    parser.add_argument("--verbose", action="store_true", help="Log every decision to stderr")
    args = parser.parse_args(argv)

    config = BotConfig(first_strategy=args.first, second_strategy=args.second, verbose=args.verbose)
    config.legacy.dont_boost_before_lap = args.boost_lap

    Bot(config).run()

if __name__ == "__main__":
    main()
