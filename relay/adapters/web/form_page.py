"""HTML form served by the relay at GET /."""

FORM_PAGE = """<!DOCTYPE html>
<html lang="de">
  <head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Claude Teams Bot</title>
    <style>
      body { font-family: 'Segoe UI', Tahoma, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; background: #f5f5f5; }
      .container { background: white; padding: 30px; border-radius: 10px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }
      h1 { color: #464775; text-align: center; }
      label { display: block; margin-bottom: 5px; font-weight: bold; }
      textarea { width: 100%; min-height: 100px; padding: 10px; border: 2px solid #ddd; border-radius: 5px; font-size: 16px; box-sizing: border-box; }
      button { background: #0078d4; color: white; padding: 12px 30px; border: none; border-radius: 5px; font-size: 16px; width: 100%; margin-top: 10px; cursor: pointer; }
      button:disabled { background: #ccc; cursor: not-allowed; }
      .response { margin-top: 20px; padding: 15px; border-radius: 5px; display: none; white-space: pre-wrap; }
      .response.success { background: #d4edda; color: #155724; }
      .response.error { background: #f8d7da; color: #721c24; }
    </style>
  </head>
  <body>
    <div class="container">
      <h1>🤖 Claude Teams Bot</h1>
      <form id="messageForm">
        <label for="message">Nachricht an Claude:</label>
        <textarea id="message" name="message" placeholder="Stellen Sie Claude eine Frage oder bitten Sie um Hilfe..." required></textarea>
        <button type="submit" id="submitBtn">📤 An Teams senden</button>
      </form>
      <div id="response" class="response"></div>
    </div>
    <script>
      const form = document.getElementById('messageForm');
      form.addEventListener('submit', async (e) => {
        e.preventDefault();
        const input = document.getElementById('message');
        const btn = document.getElementById('submitBtn');
        const out = document.getElementById('response');
        btn.disabled = true;
        btn.textContent = '⏳ Verarbeitung...';
        out.style.display = 'none';
        try {
          const res = await fetch('/send', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({ message: input.value })
          });
          const data = await res.json();
          if (res.ok) {
            out.className = 'response success';
            out.textContent = '✅ ' + data.message + '\\n\\n' + data.response;
            input.value = '';
          } else {
            out.className = 'response error';
            out.textContent = '❌ Fehler: ' + data.error;
          }
        } catch (err) {
          out.className = 'response error';
          out.textContent = '❌ Verbindungsfehler: ' + err.message;
        }
        out.style.display = 'block';
        btn.disabled = false;
        btn.textContent = '📤 An Teams senden';
      });
    </script>
  </body>
</html>
"""
