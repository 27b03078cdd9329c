"""Value and level encodings used inside Parquet data pages."""