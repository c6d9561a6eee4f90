# ==============================================================================
# incentives/calculator/validator.py
# ------------------------------------------------------------------------------
# Rules that relate calculator input fields to each other. Per-field checks
# live in the WTForms forms; these run once every field has parsed.
# The engines themselves trust their input.
# ==============================================================================


def _error(field, message):
    return {'field': field, 'message': message}


def manager_cross_field_errors(values):
    """
    Checks the rules that relate manager fields to each other.

    Args:
        values (dict): Parsed field values keyed by ManagerInput field name.

    Returns:
        list: Error dicts with 'field' and 'message' keys; empty when valid.
    """
    errors = []
    if values['net_sales'] > values['gross_sales']:
        errors.append(_error('net_sales', 'Net sales cannot exceed gross sales'))
    split = values['non_discounted_net_sales'] + values['manager_coupon_net_sales'] + values['referral_net_sales']
    if split > values['net_sales']:
        errors.append(_error(
            'non_discounted_net_sales',
            'Sum of non-discounted, manager coupon, and referral sales cannot exceed net sales'
        ))
    if values['net_sales'] > 0 and values['gross_sales'] <= 0:
        errors.append(_error('gross_sales', 'Gross sales must be greater than 0 if net sales is greater than 0'))
    return errors


def ic_cross_field_errors(values):
    """Checks the rules that relate IC fields to each other."""
    split = values['non_discounted_net_sales'] + values['referral_sales_count'] + values['manager_coupon_sales_count']
    if split > values['net_sales']:
        return [_error(
            'non_discounted_net_sales',
            'Sum of non-discounted, referral, and manager coupon sales cannot exceed net sales'
        )]
    return []
