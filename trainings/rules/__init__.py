from trainings.rules.loader import load_rules
from trainings.rules.models import CancellationRules, Rules, TrainingRules, default_rules

__all__ = ["CancellationRules", "Rules", "TrainingRules", "default_rules", "load_rules"]
