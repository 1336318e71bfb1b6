from typing import Final

REQUIRED_URL_PREFIX: Final[str] = "https://"

# Screen labels
NAME_LABEL: Final[str] = "Nombre de la receta"
URL_LABEL: Final[str] = "URL de la imagen (https)"
SUBMIT_LABEL: Final[str] = "Agregar"

# Status messages
STATUS_ADDED: Final[str] = "Receta agregada."
STATUS_DUPLICATE: Final[str] = "Esa receta ya existe."
STATUS_INCOMPLETE: Final[str] = "Completa nombre y URL."
STATUS_REMOVED: Final[str] = "Eliminada: {name}"
IMAGE_ERROR_NOTICE: Final[str] = "No se pudo cargar la imagen: {message}"

# Submit outcomes
RESULT_ADDED: Final[str] = "added"
RESULT_DUPLICATE: Final[str] = "duplicate"
RESULT_EMPTY: Final[str] = "empty"

# Row layout
IMAGE_SIZE_PX: Final[int] = 80
TITLE_MAX_LINES: Final[int] = 2

# Image load states
IMAGE_LOADING: Final[str] = "loading"
IMAGE_READY: Final[str] = "ready"
IMAGE_ERROR: Final[str] = "error"
