"""Training commands and their validation."""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from mlhub.domain.entities.training import KeyValue, TrainingConfig
from mlhub.domain.errors import ValidationError
from mlhub.domain.values import Account

INVALID_TRAINING_CMD = "invalid cmd of creating training"
INVALID_TRAINING_INPUT = "invalid input"

# (rule name, passed, message reported when it fails)
Check = Tuple[str, bool, str]


@dataclass
class TrainingCreateCmd:
    """Request to create a training job for a project.

    Attributes:
        user: Account submitting the training
        project_id: Project the training belongs to
        config: Submitted training configuration
    """
    user: Optional[Account] = None
    project_id: str = ""
    config: TrainingConfig = field(default_factory=TrainingConfig)

    def validate(self) -> None:
        """Check the command before anything is submitted or persisted.

        Rules run in a fixed order and the first failure wins. Scalar,
        compute and key-value failures share one generic message; input
        binding failures use a distinct one. The failing rule is available
        as ``ValidationError.rule``.

        Raises:
            ValidationError: If any rule fails
        """
        for rule, passed, message in self._checks():
            if not passed:
                raise ValidationError(message, rule=rule)

    def _checks(self) -> Iterator[Check]:
        cfg = self.config
        generic = INVALID_TRAINING_CMD

        yield "user", self.user is not None, generic
        yield "project_id", bool(self.project_id), generic
        yield "project_name", cfg.project_name is not None, generic
        yield "project_repo_id", bool(cfg.project_repo_id), generic
        yield "name", cfg.name is not None, generic
        yield "code_dir", cfg.code_dir is not None, generic
        yield "boot_file", cfg.boot_file is not None, generic

        c = cfg.compute
        yield "compute.flavor", c.flavor is not None, generic
        yield "compute.type", c.type is not None, generic
        yield "compute.version", c.version is not None, generic

        yield from _key_value_checks("hyperparameters", cfg.hyperparameters, generic)
        yield from _key_value_checks("env", cfg.env, generic)

        for i, v in enumerate(cfg.inputs):
            prefix = f"inputs[{i}]"
            yield f"{prefix}.key", v.key is not None, INVALID_TRAINING_INPUT
            yield f"{prefix}.user", v.user is not None, INVALID_TRAINING_INPUT
            yield f"{prefix}.type", v.type is not None, INVALID_TRAINING_INPUT
            yield f"{prefix}.repo_id", bool(v.repo_id), INVALID_TRAINING_INPUT

    def to_training_config(self) -> TrainingConfig:
        return self.config


def _key_value_checks(name: str, kvs: List[KeyValue], message: str) -> Iterator[Check]:
    for i, kv in enumerate(kvs):
        yield f"{name}[{i}].key", kv.key is not None, message
