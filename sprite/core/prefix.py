COMMENT_PREFIX = "**"
