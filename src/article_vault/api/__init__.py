"""HTTP command surface for the article-vault project."""
