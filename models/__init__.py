"""Value types shared by the classifier and its callers."""
