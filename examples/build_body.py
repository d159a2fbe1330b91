import click
from formpart import MultipartBody, MultipartPart, build_multipart


def main() -> None:
    files = {"file": ("hello.txt", b"hello multipart", "text/plain")}
    data = {"foo": "bar"}

    # One-shot helper, same inputs an HTTP client would pass through
    ctype, body = build_multipart(data, files)
    click.secho(f"Content-Type: {ctype}", fg="green")
    click.secho(f"Content-Length: {len(body)}", fg="green")
    click.echo(body.decode("utf-8"))

    # Arranging parts by hand with a fixed boundary
    form = MultipartBody(boundary="example-boundary")
    form.add_field("a", "1")
    form.add_part(MultipartPart(b"\x89PNG", "avatar", "avatar.png", "image/png"))
    click.secho(f"{form!r} -> {form.content_length} bytes", fg="cyan")
    click.echo(repr(bytes(form)))


if __name__ == "__main__":
    main()
