"""Static landing pages used as eSewa redirect targets."""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{title}</title>
</head>
<body style="min-height:100vh;display:flex;align-items:center;justify-content:center;font-family:sans-serif">
  <div style="text-align:center">
    <div style="font-size:4rem;color:{color}">{icon}</div>
    <h1>{title}</h1>
    <p style="color:#4b5563">{message}</p>
  </div>
</body>
</html>
"""

SUCCESS_PAGE = PAGE_TEMPLATE.format(
    title="Payment Successful!",
    icon="&#10004;",
    color="#22c55e",
    message="Thank you for your Payment. Your transaction has been completed successfully.",
)

FAILURE_PAGE = PAGE_TEMPLATE.format(
    title="Payment Failed",
    icon="&#10008;",
    color="#ef4444",
    message="Your payment could not be completed or was cancelled. No amount has been charged.",
)
