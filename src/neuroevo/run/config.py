import configparser
import os

from neuroevo.activations import get_activation
from neuroevo.phenotype   import Network

class Config:

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding default values,
                         which can then be changed attribute by attribute.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.population_size = 100
            self.seed            = None

            self.num_inputs               = 2
            self.num_outputs              = 1
            self.num_hidden_layers        = 1
            self.neurons_per_hidden_layer = 4
            self.activation               = 'sigmoid'
            self.bias                     = 1.0
            self.activation_response      = 1.0

            self.mutation_rate    = 0.001
            self.crossover_rate   = 0.7
            self.max_elite        = 10
            self.max_elite_copies = 20
            self.max_perturbation = 1.0

            self.max_number_generations    = 100
            self.fitness_termination_check = False
            self.fitness_criterion         = 'max'
            self.fitness_threshold         = None

            self.log_level = 'INFO'
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [POPULATION]

        # The number of chromosomes in each generation.
        self.population_size = get_value('POPULATION', 'population_size', int)

        # Seed of the random number generator driving a trial.
        # Use "None" for a different run every time.
        self.seed = get_value('POPULATION', 'seed', int, default=None)

        # [NETWORK]

        # The number of inputs and outputs of each network.
        self.num_inputs  = get_value('NETWORK', 'num_inputs' , int)
        self.num_outputs = get_value('NETWORK', 'num_outputs', int)

        # The number of hidden layers, and the number of neurons in each of them.
        # With more than one hidden layer, every hidden layer is wired to
        # 'num_inputs' inputs, so 'neurons_per_hidden_layer' must equal 'num_inputs'.
        self.num_hidden_layers        = get_value('NETWORK', 'num_hidden_layers'       , int)
        self.neurons_per_hidden_layer = get_value('NETWORK', 'neurons_per_hidden_layer', int)

        # Activation function applied by every neuron (see 'basic_activations.py').
        self.activation = get_value('NETWORK', 'activation', str, default='sigmoid')

        # The constant input multiplied by each neuron's bias weight.
        self.bias = get_value('NETWORK', 'bias', float, default=1.0)

        # Each neuron's weighted sum is divided by this value before activation.
        # Larger values make the activation flatter.
        self.activation_response = get_value('NETWORK', 'activation_response', float, default=1.0)

        # [REPRODUCTION]

        # The probability that a gene is replaced by a new random value.
        # Keep it very low (around 0.001).
        self.mutation_rate = get_value('REPRODUCTION', 'mutation_rate', float)

        # The probability that two parents are recombined through crossover,
        # rather than passed on unchanged (0.7 works well).
        self.crossover_rate = get_value('REPRODUCTION', 'crossover_rate', float)

        # The number of fittest chromosomes carried over unchanged to the next
        # generation, and how many copies of each. Their product should be even
        # and not larger than 'population_size'.
        self.max_elite        = get_value('REPRODUCTION', 'max_elite'       , int, default=10)
        self.max_elite_copies = get_value('REPRODUCTION', 'max_elite_copies', int, default=20)

        # Mutated genes take a random value uniformly drawn from [0, max_perturbation).
        self.max_perturbation = get_value('REPRODUCTION', 'max_perturbation', float, default=1.0)

        # [TERMINATION]

        # The number of generations after which to stop the run.
        # If 'fitness_termination_check' is 'True', the run may stop sooner.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int)

        # Whether to use the fitness of the most recent
        # generation as a criterion for stopping the run.
        self.fitness_termination_check = get_value('TERMINATION', 'fitness_termination_check', bool, default=False)

        # The function used to compute the termination criterion.
        # Only applicable if 'fitness_termination_check' is 'True'.
        # Allowed values:
        #   "mean" calculate the mean fitness across the entire population
        #   "max"  get the fitness of the fittest chromosome in the population
        self.fitness_criterion = get_value('TERMINATION', 'fitness_criterion', str, default='max')

        # The fitness value which when met or exceeded causes the run to end.
        # Only applicable if 'fitness_termination_check' is 'True'.
        self.fitness_threshold = get_value('TERMINATION', 'fitness_threshold', float, default=None)

        # [LOGGING]

        # Minimum level of the messages emitted while running a trial.
        # Library code never installs sinks: the application applies this
        # value with 'neuroevo.configure_logging(config.log_level)'.
        self.log_level = get_value('LOGGING', 'log_level', str, default='INFO')

    @property
    def genome_size(self) -> int:
        """The number of weights in a network, i.e. the length of every chromosome."""
        return Network.count_weights(self.num_inputs,
                                     self.num_outputs,
                                     self.num_hidden_layers,
                                     self.neurons_per_hidden_layer)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to validate the activation function name when set,
        so that a typo is reported when the configuration is built rather than
        when the first network is.
        """
        if name == 'activation':
            get_activation(value)
        super().__setattr__(name, value)
