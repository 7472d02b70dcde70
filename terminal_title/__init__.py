"""Terminal title templates: formatters and a preview API around template_string."""
