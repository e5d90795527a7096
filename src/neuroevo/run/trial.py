"""
Trial Module

This module defines the abstract base class for a neuroevolution trial.

A trial represents one independent run of the genetic algorithm, evolving a
population of chromosomes through generations until a solution is found or the
maximum number of generations is reached.
"""

from abc        import ABC, abstractmethod
from statistics import mean
from typing     import Optional

import numpy as np
from loguru import logger

from neuroevo.genotype   import Chromosome
from neuroevo.phenotype  import Network
from neuroevo.pool       import FitnessStatistics, GeneticAlgorithm, create_population, get_fittest
from neuroevo.run.config import Config

class Trial(ABC):
    """
    Abstract base class for implementing a neuroevolution trial.

    The trial owns the population, the random number generator and a single
    Network used to decode chromosomes. Each generation, every chromosome is
    decoded into the network and scored by '_evaluate_fitness'; the genetic
    algorithm then produces the next generation from the scored population.

    Subclasses must implement:
    - _evaluate_fitness(network): Evaluate the fitness of a decoded network

    Subclasses can override:
    - _reset():           Reset trial-specific state (call super()._reset())
    - _report_progress(): Report after each generation (default: log statistics)
    - _final_report():    Report at the end of the trial (default: log the champion)
    - _terminate():       Custom termination logic (default: max generations + fitness threshold)

    Public Attributes:
        failed: False if the trial reached its fitness threshold

    Public Properties:
        generation: The number of generations produced so far
        population: The current population
        champion:   The fittest chromosome of the current population

    Public Methods:
        run(): Execute a complete trial
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          configuration parameters
            suppress_output: If True, suppress progress and final reports
        """
        self._config            : Config                        = config
        self._generation_counter: int                           = 0
        self._population        : Optional[list[Chromosome]]    = None
        self._rng               : Optional[np.random.Generator] = None
        self._network           : Optional[Network]             = None
        self._algorithm         : Optional[GeneticAlgorithm]    = None
        self._suppress_output   : bool                          = suppress_output
        self.failed             : bool                          = True

    @property
    def generation(self) -> int:
        return self._generation_counter

    @property
    def population(self) -> Optional[list[Chromosome]]:
        return self._population

    @property
    def champion(self) -> Optional[Chromosome]:
        if self._population is None:
            return None
        return get_fittest(self._population)

    def run(self):
        """
        Run the trial.

        Resets the trial state and runs the genetic
        algorithm until the terminate condition is met.
        """
        # Reset the trial state before starting a new run
        self._reset()

        # Create and evaluate the initial population
        self._population = create_population(self._config.population_size,
                                             self._config.genome_size,
                                             self._rng)
        self._evaluate_fitness_all()

        if not self._suppress_output:
            self._report_progress()

        # Evolution loop
        while not self._terminate():
            self._generation_counter += 1

            # The members of the population mate and create offspring
            self._population = self._algorithm.epoch(self._population, self._rng)

            # Evaluate the fitness of each chromosome in the new generation
            self._evaluate_fitness_all()

            if not self._suppress_output:
                self._report_progress()

        if not self._suppress_output:
            self._final_report()

    def _reset(self):
        """
        Reset the trial state before starting a new run.

        Subclasses overriding this method must call super()._reset().

        Raises:
            RuntimeError: if the fitness termination check is enabled without a threshold
        """
        if self._config.fitness_termination_check and self._config.fitness_threshold is None:
            raise RuntimeError("'fitness_threshold' must be set when 'fitness_termination_check' is enabled")

        self._rng       = np.random.default_rng(self._config.seed)
        self._network   = Network.from_config(self._config, self._rng)
        self._algorithm = GeneticAlgorithm.from_config(self._config)
        self._generation_counter = 0
        self._population = None
        self.failed = True

    @abstractmethod
    def _evaluate_fitness(self, network: Network) -> float:
        """
        Evaluate and return the fitness of a network.

        The network has already been loaded with the weights of the chromosome
        being evaluated. Higher fitness values indicate better performance and
        a higher probability of procreating.

        IMPORTANT: The fitness must be a positive number (or zero).

        Parameters:
            network: The decoded network to evaluate

        Returns:
            float: Fitness score
        """
        pass

    def _evaluate_fitness_all(self):
        """
        Decode each chromosome into the trial's network and store its fitness.

        Raises:
            RuntimeError: if a chromosome does not fit the network
        """
        for chromosome in self._population:
            if not self._network.put_weights(chromosome.weights):
                raise RuntimeError(f"chromosome with {len(chromosome)} genes does not fit "
                                   f"a network of {self._network.number_of_weights} weights")
            chromosome.fitness = self._evaluate_fitness(self._network)

    def _report_progress(self):
        """
        Report trial progress after each generation.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        stats = FitnessStatistics()
        stats.compute(self._population)
        logger.info("Generation {:4d}: {}", self._generation_counter, stats)

    def _final_report(self):
        """
        Produce the final report at the end of the trial.

        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        outcome = "failed" if self.failed else "succeeded"
        logger.info("Trial {} after {} generations, champion fitness {:.4f}",
                    outcome, self._generation_counter, self.champion.fitness)

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        This default implementation stops the trial after a maximum number
        of generations and (optionally) also stops it if a given measure of
        population fitness has reached a given threshold.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        # Has this trial run for too long?
        terminate = self._generation_counter >= self._config.max_number_generations

        # Check whether the fitness has reached a target threshold
        if self._config.fitness_termination_check:
            fitness = [chromosome.fitness for chromosome in self._population]

            if self._config.fitness_criterion == "max":
                overall_fitness = max(fitness)
            elif self._config.fitness_criterion == "mean":
                overall_fitness = mean(fitness)
            else:
                raise RuntimeError("bad 'fitness_criterion' in configuration file")

            # Compare a measure of population fitness (max, mean, ...) against a threshold
            success = overall_fitness >= self._config.fitness_threshold
            terminate = terminate or success

            if terminate:
                self.failed = not success

        return terminate
