from typing import Any, ClassVar, Dict, Tuple

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer


# -----------------------------------------------------------------------------
# Base Model
# -----------------------------------------------------------------------------
class HalModel(BaseModel):
    """
    Base for every HAL shape.

    Optional HAL members listed in ``omit_if_none`` are dropped from dumps
    when they hold None, so the JSON body never carries ``"_links": null``.
    """
    # Field names (not aliases) left out of dumps while None
    omit_if_none: ClassVar[Tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def omit_absent_members(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        fields = type(self).model_fields
        for name in self.omit_if_none:
            field = fields.get(name)
            keys = {name} if field is None or field.alias is None else {name, field.alias}
            for key in keys:
                if key in data and data[key] is None:
                    del data[key]
        return data
