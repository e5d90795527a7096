"""
Soft OR Problem

This module evolves a network approximating a "soft" OR of two sensor readings:

    target(x1, x2) = 0.5 + 0.5 * max(x1, x2)

sampled on a 5x5 grid of inputs in [0, 1]. Since the genetic algorithm draws
weights from [0, 1), sigmoid networks produce outputs in [0.5, 1), which is
the range of the target.

Fitness Function:
    Fitness = N - sum((output - target)^2)

    where N is the number of grid points; a perfect network scores N.

Usage:
    python examples/trial_soft_or.py
"""

import numpy as np
from pathlib import Path

from neuroevo           import configure_logging
from neuroevo.phenotype import Network
from neuroevo.run       import Config, Trial

class Trial_SoftOR(Trial):
    """
    Trial evolving a network that computes a soft OR of its two inputs.

    Implemented Methods:
        _evaluate_fitness(network): Score the network on every grid point
        _final_report():            Display the champion's outputs
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        super().__init__(config, suppress_output)

        grid = np.linspace(0.0, 1.0, 5)
        self.inputs  = np.array([[x1, x2] for x1 in grid for x2 in grid])
        self.targets = 0.5 + 0.5 * self.inputs.max(axis=1)

    def _evaluate_fitness(self, network: Network) -> float:
        errors = [network.update(inputs)[0] - target
                  for inputs, target in zip(self.inputs, self.targets)]
        return len(self.targets) - float(np.sum(np.square(errors)))

    def _final_report(self):
        super()._final_report()

        network = Network.from_config(self._config, np.random.default_rng(0))
        network.put_weights(self.champion.weights)

        print("input         output   target")
        print("-----------------------------")
        for inputs, target in zip(self.inputs, self.targets):
            output = network.update(inputs)[0]
            print(f"[{inputs[0]:.2f}, {inputs[1]:.2f}] -> {output:.4f}   {target:.4f}")

if __name__ == '__main__':
    config = Config(str(Path(__file__).parent / "config_soft_or.ini"))
    configure_logging(config.log_level)

    trial = Trial_SoftOR(config)
    trial.run()
