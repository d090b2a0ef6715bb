from marshmallow import Schema, fields, validate, validates_schema, ValidationError, EXCLUDE


def reject_non_numbers(original_data, names):
    """JSON numbers only: Float would otherwise accept "2" and true."""
    if not isinstance(original_data, dict):
        return
    errors = {
        name: ["Not a valid number."]
        for name in names
        if isinstance(original_data.get(name), (str, bool))
    }
    if errors:
        raise ValidationError(errors)


class CreateFoodLogSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1))
    duby = fields.Float(required=True)
    unit = fields.Str(required=True)
    portion = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    occurred_at = fields.Str(allow_none=True, load_default=None)

    @validates_schema(pass_original=True)
    def validate_number_types(self, data, original_data, **kwargs):
        reject_non_numbers(original_data, ("duby", "portion"))


class CreateWeightLogSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    weight_kg = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    date = fields.Str(allow_none=True, load_default=None)

    @validates_schema(pass_original=True)
    def validate_number_types(self, data, original_data, **kwargs):
        reject_non_numbers(original_data, ("weight_kg",))
