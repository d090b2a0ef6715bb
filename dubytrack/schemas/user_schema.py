from marshmallow import Schema, fields, validate, validates_schema, EXCLUDE
from dubytrack.schemas.log_schema import reject_non_numbers
from dubytrack.utils.enums import ActivityLevel


class RegisterSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1))
    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=6))


class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=1))


class ProfileSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    height_cm = fields.Int(required=True, strict=True, validate=validate.Range(min=0, min_inclusive=False))
    current_weight_kg = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    goal_weight_kg = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    target_date = fields.Str(allow_none=True, load_default=None)
    gender = fields.Str(required=True)
    age = fields.Int(required=True, strict=True, validate=validate.Range(min=0, min_inclusive=False))
    activity_level = fields.Str(required=True, validate=validate.OneOf([e.value for e in ActivityLevel]))

    @validates_schema(pass_original=True)
    def validate_number_types(self, data, original_data, **kwargs):
        reject_non_numbers(original_data, ("current_weight_kg", "goal_weight_kg"))
