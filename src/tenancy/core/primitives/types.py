# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field, StringConstraints

# constrained types
PositiveInt = Annotated[int, Field(strict=True, ge=0)]
PositiveIntGt0 = Annotated[int, Field(strict=True, gt=0)]
PositiveFloat = Annotated[float, Field(ge=0)]
DayOfMonth = Annotated[int, Field(strict=True, ge=1, le=31)]
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
MonthKey = Annotated[str, StringConstraints(pattern=r"^\d{4}-(0[1-9]|1[0-2])$")]
