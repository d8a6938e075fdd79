from __future__ import annotations

from typing import TYPE_CHECKING, Any

from address_validator.models import RESULT_COLUMNS

if TYPE_CHECKING:
    import pandas as pd

    from address_validator.service import AddressValidationService


def _resolve_service(service: AddressValidationService | None) -> AddressValidationService:
    if service is not None:
        return service
    from address_validator.service import get_default_service

    return get_default_service()


def _to_address(value: Any) -> Any:
    import pandas as pd

    # NaN / None cells are reported as missing addresses
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return None
    return value


class AddressValidatorAccessor:
    """Pandas accessor for address validation.

    Usage:
        >>> from address_validator.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = pd.DataFrame({"address": ["1600 Amphitheatre Pkwy, Mountain View, CA"]})
        >>> df["address"].addr.validate()
    """

    def __init__(self, pandas_obj: pd.Series) -> None:
        self._obj = pandas_obj

    def validate(self, *, service: AddressValidationService | None = None) -> pd.DataFrame:
        """Validate every address in the Series.

        Args:
            service: Optional AddressValidationService to use.

        Returns:
            DataFrame with one column per result field, indexed like the Series.
        """
        return validate_address_series(self._obj, service=service)


def register_accessor(name: str = "addr") -> None:
    """Register the validation accessor on pandas Series.

    After calling this, you can use:
        >>> series.addr.validate()

    Args:
        name: Name for the accessor (default: "addr").
    """
    import pandas as pd

    if not hasattr(pd.Series, name):
        pd.api.extensions.register_series_accessor(name)(AddressValidatorAccessor)


def validate_address_series(
    series: pd.Series,
    *,
    service: AddressValidationService | None = None,
) -> pd.DataFrame:
    """Validate a Series of addresses and return a DataFrame of results.

    Args:
        series: Pandas Series containing address strings.
        service: Optional AddressValidationService to use.

    Returns:
        DataFrame with columns from RESULT_COLUMNS, indexed like ``series``.
    """
    import pandas as pd

    svc = _resolve_service(service)
    rows = [svc.validate(_to_address(value)).to_row() for value in series.tolist()]
    return pd.DataFrame(rows, index=series.index, columns=list(RESULT_COLUMNS))


def validate_addresses(
    df: pd.DataFrame,
    address_column: str,
    *,
    prefix: str = "",
    inplace: bool = False,
    service: AddressValidationService | None = None,
) -> pd.DataFrame:
    """Validate addresses in a DataFrame and add a column per result field.

    Args:
        df: Input DataFrame containing addresses.
        address_column: Name of the column containing address strings.
        prefix: Prefix to add to new column names.
        inplace: If True, modify DataFrame in place.
        service: Optional AddressValidationService to use.

    Returns:
        DataFrame with the new result columns.

    Raises:
        KeyError: If ``address_column`` is not in ``df``.
    """
    if address_column not in df.columns:
        raise KeyError(f"Column '{address_column}' not found in DataFrame")

    target = df if inplace else df.copy()
    results = validate_address_series(target[address_column], service=service)

    for column in RESULT_COLUMNS:
        target[f"{prefix}{column}"] = results[column]

    return target
