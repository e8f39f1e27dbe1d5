"""Tests for DEConfig builder, shortcuts and validation."""

from __future__ import annotations

import json

import pytest


class TestDEConfigShortcuts:
    """Test DEConfig.default() and from_dict()."""

    def test_default_creates_valid_config(self):
        """default() should create a valid frozen config."""
        from modevo import DEConfig, GenerationCountTermination

        cfg = DEConfig.default()

        assert cfg.pop_size == 100
        assert cfg.cr == 0.5
        assert cfg.f == 1.0
        assert len(cfg.termination) == 1
        assert isinstance(cfg.termination[0], GenerationCountTermination)
        assert cfg.termination[0].n_generations == 100

    def test_default_with_custom_sizes(self):
        from modevo import DEConfig

        cfg = DEConfig.default(pop_size=20, max_generations=5)
        assert cfg.pop_size == 20
        assert cfg.termination[0].n_generations == 5

    def test_from_dict_basic(self):
        """from_dict() should accept upper- and lower-case rate keys."""
        from modevo import DEConfig, EvaluationBudgetTermination

        cfg = DEConfig.from_dict({"pop_size": 30, "CR": 0.9, "F": 0.8, "max_evaluations": 3000})

        assert cfg.pop_size == 30
        assert cfg.cr == 0.9
        assert cfg.f == 0.8
        assert isinstance(cfg.termination[0], EvaluationBudgetTermination)

    def test_from_dict_termination_forms(self):
        from modevo import DEConfig

        as_pairs = DEConfig.from_dict({"pop_size": 10, "termination": [["max_generations", 5], ["n_eval", 100]]})
        as_mapping = DEConfig.from_dict({"pop_size": 10, "termination": {"max_generations": 5, "n_eval": 100}})

        assert [repr(c) for c in as_pairs.termination] == [repr(c) for c in as_mapping.termination]
        assert len(as_pairs.termination) == 2

    def test_from_dict_without_pop_size(self):
        from modevo import DEConfig
        from modevo.foundation.exceptions import MissingConfigError

        with pytest.raises(MissingConfigError):
            DEConfig.from_dict({"cr": 0.5})


class TestDEConfigValidation:
    @pytest.mark.parametrize(
        "params",
        [
            {"pop_size": 3},
            {"pop_size": 4.5},
            {"pop_size": True},
            {"pop_size": 10, "cr": -0.1},
            {"pop_size": 10, "cr": 1.5},
            {"pop_size": 10, "f": 0.0},
            {"pop_size": 10, "f": -1.0},
        ],
    )
    def test_invalid_parameters_are_rejected(self, params):
        from modevo import DEConfigData, InvalidParameterError

        with pytest.raises(InvalidParameterError):
            DEConfigData(**params)

    def test_boundary_values_are_accepted(self):
        from modevo import DEConfigData

        cfg = DEConfigData(pop_size=4, cr=0.0, f=1e-9)
        assert cfg.pop_size == 4
        assert DEConfigData(pop_size=4, cr=1.0).cr == 1.0

    def test_config_is_frozen(self):
        from dataclasses import FrozenInstanceError

        from modevo import DEConfig

        cfg = DEConfig.default()
        with pytest.raises(FrozenInstanceError):
            cfg.pop_size = 10


def test_builder_chains_and_serializes():
    from modevo import DEConfig

    cfg = DEConfig().pop_size(12).cr(0.3).f(0.7).max_generations(4).max_evaluations(1000).fixed()
    data = json.loads(cfg.to_json())

    assert data == {
        "pop_size": 12,
        "cr": 0.3,
        "f": 0.7,
        "termination": [["max_generations", 4], ["max_evaluations", 1000]],
    }


class TestDEConfigRoundtrip:
    """from_dict(cfg.to_dict()) must rebuild an equal config."""

    def test_default_roundtrip(self):
        from modevo import DEConfig

        cfg = DEConfig.default(pop_size=10, max_generations=5)
        assert DEConfig.from_dict(cfg.to_dict()) == cfg

    def test_json_roundtrip_with_every_configurable_criterion(self):
        from modevo import DEConfig
        from modevo.engine.algorithm.components.termination import FitnessThresholdTermination

        cfg = (
            DEConfig()
            .pop_size(8)
            .cr(0.9)
            .f(0.4)
            .max_generations(50)
            .max_evaluations(400)
            .termination(FitnessThresholdTermination(1e-3))
            .fixed()
        )
        restored = DEConfig.from_dict(json.loads(cfg.to_json()))

        assert restored == cfg
        assert restored.to_json() == cfg.to_json()

    def test_stop_flag_serializes_as_a_fresh_flag(self):
        from modevo import DEConfig, StopFlagTermination

        flag = StopFlagTermination()
        flag.request_stop()
        data = DEConfig().pop_size(4).termination(flag).fixed().to_dict()

        assert data["termination"] == [["stop_flag", None]]
        restored = DEConfig.from_dict(data).termination[0]
        assert isinstance(restored, StopFlagTermination)
        assert not restored.event.is_set()

    def test_lambda_criterion_cannot_be_serialized(self):
        from modevo import ConfigurationError, DEConfig, LambdaTermination

        def enough(alg):
            return True

        cfg = DEConfig().pop_size(4).termination(LambdaTermination(enough)).fixed()

        assert repr(cfg.termination[0]) == "LambdaTermination(TestDEConfigRoundtrip.test_lambda_criterion_cannot_be_serialized.<locals>.enough)"
        with pytest.raises(ConfigurationError, match="no configuration form"):
            cfg.to_json()


class TestDEConfigInputChecks:
    @pytest.mark.parametrize("bad", ["fast", None, [0.5]])
    def test_non_numeric_rates_are_rejected(self, bad):
        from modevo import DEConfigData, InvalidParameterError

        with pytest.raises(InvalidParameterError, match="real number"):
            DEConfigData(pop_size=4, cr=bad)
        with pytest.raises(InvalidParameterError, match="real number"):
            DEConfigData(pop_size=4, f=bad)

    def test_numeric_strings_are_coerced(self):
        from modevo import DEConfigData

        cfg = DEConfigData(pop_size=4, cr="0.5", f="0.8")
        assert (cfg.cr, cfg.f) == (0.5, 0.8)

    def test_misspelled_key_is_reported(self):
        from modevo import ConfigurationError, DEConfig

        with pytest.raises(ConfigurationError, match="max_generation") as excinfo:
            DEConfig.from_dict({"pop_size": 10, "max_generation": 100})
        assert excinfo.value.suggestion == "Did you mean: max_generations?"

    def test_unrelated_key_lists_known_keys(self):
        from modevo import ConfigurationError, DEConfig

        with pytest.raises(ConfigurationError) as excinfo:
            DEConfig.from_dict({"pop_size": 10, "seed": 3})
        assert excinfo.value.suggestion.startswith("Known keys: pop_size")
