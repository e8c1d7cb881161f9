"""Shell quoting, datasource classification and process execution."""
