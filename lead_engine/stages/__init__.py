# Scoring stages module
from .developer_signals import DeveloperSignalStage
from .founder_signals import FounderSignalStage
from .reasoning import generate_reasoning
