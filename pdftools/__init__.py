"""PDF Toolkit: split, merge, image conversion and metadata for PDF files."""
