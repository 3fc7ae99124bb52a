from django.db import migrations, models

import hsts_filter.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="HstsPolicyRecord",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "singleton_key",
                    models.CharField(
                        default="default", editable=False, max_length=32, unique=True
                    ),
                ),
                (
                    "send_header",
                    models.BooleanField(
                        default=True,
                        help_text="Whether to send the Strict-Transport-Security header",
                    ),
                ),
                (
                    "max_age",
                    models.CharField(
                        default="31536000",
                        help_text="Seconds the browser must treat this host as HTTPS-only",
                        max_length=255,
                        validators=[hsts_filter.validators.validate_max_age],
                    ),
                ),
                (
                    "include_subdomains",
                    models.BooleanField(
                        default=True,
                        help_text="Apply the policy to every subdomain of this host",
                    ),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "HSTS Policy",
                "verbose_name_plural": "HSTS Policy",
            },
        ),
    ]
