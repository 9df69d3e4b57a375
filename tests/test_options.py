import pytest

from ollama_api import Options
from ollama_api.models import CreateModelRequest, GenerateRequest

SAMPLE_VALUES = {
    "mirostat": 1,
    "mirostat_eta": 0.1,
    "mirostat_tau": 5.0,
    "num_ctx": 2048,
    "repeat_last_n": 64,
    "repeat_penalty": 1.1,
    "temperature": 0.8,
    "seed": 42,
    "stop": "\n",
    "num_predict": 128,
    "top_k": 40,
    "top_p": 0.9,
    "min_p": 0.05,
}


def test_sample_covers_every_field():
    assert set(SAMPLE_VALUES) == set(Options.model_fields)


def test_unset_options_are_default():
    assert Options().is_default()


@pytest.mark.parametrize("name,value", SAMPLE_VALUES.items())
def test_setting_any_field_clears_default(name, value):
    options = Options()
    setattr(options, name, value)
    assert not options.is_default()


def test_zero_counts_as_set():
    options = Options()
    options.mirostat = 0
    assert not options.is_default()


def test_out_of_range_values_pass_through():
    options = Options(temperature=-3.0, seed=-1, top_p=7.5)
    assert options.model_dump(exclude_none=True) == {"temperature": -3.0, "seed": -1, "top_p": 7.5}


def test_default_options_are_omitted_from_payload():
    assert GenerateRequest(model="m").to_payload() == {"model": "m", "stream": False}


def test_set_options_are_sent_sparse():
    payload = GenerateRequest(model="m", options=Options(temperature=0.5, top_k=10)).to_payload()
    assert payload["options"] == {"temperature": 0.5, "top_k": 10}


def test_create_model_parameters_follow_same_rule():
    assert "parameters" not in CreateModelRequest(model="m").to_payload()
    payload = CreateModelRequest(model="m", parameters=Options(num_ctx=4096)).to_payload()
    assert payload["parameters"] == {"num_ctx": 4096}
