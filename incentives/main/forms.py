# ==============================================================================
# incentives/main/forms.py
# ------------------------------------------------------------------------------
# Defines web forms using Flask-WTF for user input and validation.
# The same forms validate the JSON API, which Flask-WTF reads as form data.
# ==============================================================================

from dataclasses import fields

from flask_wtf import FlaskForm
from wtforms import IntegerField, SelectField, SubmitField
from wtforms.validators import InputRequired, NumberRange, StopValidation

from incentives.calculator.models import EmploymentStatus, ICInput, ManagerInput
from incentives.calculator.validator import ic_cross_field_errors, manager_cross_field_errors


class CountField(IntegerField):
    """
    IntegerField that also takes JSON numbers. Booleans and fractional values
    are rejected instead of being truncated by int(). Forms whose Meta sets
    json_numbers_only also reject numeric strings such as "12".
    """

    def __init__(self, label=None, validators=None, invalid_message='Not a valid integer value.', **kwargs):
        super().__init__(label, validators, **kwargs)
        self.invalid_message = invalid_message

    def process_formdata(self, valuelist):
        if not valuelist or valuelist[0] is None or valuelist[0] == '':
            self.data = None
            return

        value = valuelist[0]
        if isinstance(value, str) and not getattr(self.meta, 'json_numbers_only', False):
            try:
                self.data = int(value.strip())
                return
            except ValueError:
                pass
        elif isinstance(value, int) and not isinstance(value, bool):
            self.data = value
            return
        elif isinstance(value, float) and value.is_integer():
            self.data = int(value)
            return

        self.data = None
        raise ValueError(self.invalid_message)


class CountRequired:
    """
    Like InputRequired, but a JSON 0 counts as input. Stops the chain when
    the value could not be parsed so the range check does not repeat the error.
    """
    field_flags = {'required': True}

    def __init__(self, message):
        self.message = message

    def __call__(self, form, field):
        if field.process_errors:
            raise StopValidation()
        if not field.raw_data or field.raw_data[0] is None or field.raw_data[0] == '':
            field.errors[:] = []
            raise StopValidation(self.message)


def _count_field(label, name, default=None, minimum=0):
    range_message = f"{name} must be positive" if minimum > 0 else f"{name} must be non-negative"
    return CountField(label, default=default, invalid_message=f"{name} must be a whole number", validators=[
        CountRequired(message=f"{name} is required"),
        NumberRange(min=minimum, message=range_message)
    ])


class _IncentiveForm(FlaskForm):
    """Shared plumbing: cross-field checks and conversion to an input record."""
    record_class = None

    def cross_field_errors(self, values):
        return []

    def validate(self, extra_validators=None):
        if not super().validate(extra_validators=extra_validators):
            return False
        errors = self.cross_field_errors(self.values())
        for error in errors:
            getattr(self, error['field']).errors.append(error['message'])
        return not errors

    def values(self):
        return {field.name: getattr(self, field.name).data
                for field in fields(self.record_class) if field.name in self}

    def to_input(self, cohort_weeks=None):
        values = self.values()
        values.setdefault('cohort_weeks', cohort_weeks)
        return self.record_class(**values)

    def error_list(self):
        """Flattens field errors into {'field', 'message'} dicts, in field order."""
        return [{'field': field.name, 'message': message} for field in self for message in field.errors]


class ManagerIncentiveForm(_IncentiveForm):
    """Form for the manager incentive calculator."""
    record_class = ManagerInput

    frozen_team_size = _count_field('Frozen Team Size', 'Team size', 9)
    gross_sales = _count_field('Gross Sales', 'Gross sales', 42)
    net_sales = _count_field('Net Sales', 'Net sales', 37)
    non_discounted_net_sales = _count_field('Non-Discounted Net Sales', 'Non-discounted net sales', 18)
    manager_coupon_net_sales = _count_field('Manager Coupon Net Sales', 'Manager coupon net sales', 12)
    referral_net_sales = _count_field('Referral Net Sales', 'Referral net sales', 7)
    submit = SubmitField('Calculate Incentive')

    def cross_field_errors(self, values):
        return manager_cross_field_errors(values)


class ICIncentiveForm(_IncentiveForm):
    """Form for the individual contributor incentive calculator."""
    record_class = ICInput

    employment_status = SelectField(
        'Employment Status',
        choices=[(status.value, status.value) for status in (EmploymentStatus.NON_PROBATION, EmploymentStatus.PROBATION)],
        default=EmploymentStatus.NON_PROBATION.value,
        validate_choice=False,
        validators=[InputRequired(message="Please select an employment status.")]
    )
    net_sales = _count_field('Net Sales', 'Net sales', 10)
    non_discounted_net_sales = _count_field('Non-Discounted Net Sales', 'Non-discounted net sales', 6)
    referral_sales_count = _count_field('Referral Sales Count', 'Referral sales count', 2)
    manager_coupon_sales_count = _count_field('Manager Coupon Sales Count', 'Manager coupon sales count', 2)
    submit = SubmitField('Calculate Incentive')

    def validate_employment_status(self, field):
        if field.data not in {status.value for status in EmploymentStatus}:
            raise StopValidation("Employment status must be 'Probation' or 'Non-Probation'")

    def cross_field_errors(self, values):
        return ic_cross_field_errors(values)

    def values(self):
        values = super().values()
        values['employment_status'] = EmploymentStatus(values['employment_status'])
        return values


# --- JSON API forms: no CSRF, numbers must be JSON numbers, cohort weeks
# supplied by the caller ---

class ManagerIncentiveApiForm(ManagerIncentiveForm):
    class Meta:
        csrf = False
        json_numbers_only = True

    cohort_weeks = _count_field('Cohort Weeks', 'Cohort weeks', minimum=1)


class ICIncentiveApiForm(ICIncentiveForm):
    class Meta:
        csrf = False
        json_numbers_only = True

    cohort_weeks = _count_field('Cohort Weeks', 'Cohort weeks', minimum=1)
