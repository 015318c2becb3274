from beamload.io.fields import InputField, input_fields

__all__ = ["InputField", "input_fields"]
