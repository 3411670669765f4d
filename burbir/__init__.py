"""BurBir: a console social network with posts, hashtags, replies, drafts, threads and friend groups."""

__version__ = "0.1.0"