import pytest

from infratest.aws.ssm import get_parameter, put_parameter


class FakeSsm:
    def __init__(self):
        self.params = {}
        self.calls = []

    def put_parameter(self, **kwargs):
        self.calls.append(kwargs)
        name = kwargs["Name"]
        version = self.params.get(name, (0, None))[0] + 1
        self.params[name] = (version, kwargs["Value"])
        return {"Version": version}

    def get_parameter(self, Name, WithDecryption):
        self.calls.append({"Name": Name, "WithDecryption": WithDecryption})
        if Name not in self.params:
            raise KeyError("ParameterNotFound")
        return {"Parameter": {"Name": Name, "Value": self.params[Name][1]}}


def test_parameter_is_found():
    client = FakeSsm()
    version = put_parameter(client, "test-name-abc", "test-description-abc", "test-value-abc")
    assert version == 1
    assert get_parameter(client, "test-name-abc") == "test-value-abc"


def test_put_uses_secure_string_and_get_decrypts():
    client = FakeSsm()
    put_parameter(client, "n", "d", "v")
    get_parameter(client, "n")
    assert client.calls[0]["Type"] == "SecureString"
    assert client.calls[1]["WithDecryption"] is True


def test_versions_increase():
    client = FakeSsm()
    first = put_parameter(client, "n", "d", "one")
    second = put_parameter(client, "n", "d", "two")
    assert second > first
    assert get_parameter(client, "n") == "two"


def test_missing_parameter_raises():
    with pytest.raises(KeyError):
        get_parameter(FakeSsm(), "missing")