"""Export layer — sitemap file output.

Writes generated sitemap pages and the sitemap index to a directory.
"""

from planisphere.export.writer import ExportedFile, WriteResult, sitemap_filenames, write_sitemaps

__all__ = ["ExportedFile", "WriteResult", "sitemap_filenames", "write_sitemaps"]
