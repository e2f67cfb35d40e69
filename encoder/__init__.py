# pyright: reportUnusedImport=false
from encoder.chunk import MAX_CHUNK_SIZE
from encoder.encoder import FormDataEncoder, FormDataEncoderOptions
from encoder.formdata import File, FormData
from encoder.headers import Headers
from encoder.protocols import FileLike, FormDataEntryValue, FormDataLike, is_file, is_form_data


__all__ = (
    "FormDataEncoder",
    "FormDataEncoderOptions",
    "FormData",
    "File",
    "Headers",
    "FileLike",
    "FormDataLike",
    "FormDataEntryValue",
    "is_file",
    "is_form_data",
    "MAX_CHUNK_SIZE",
)
