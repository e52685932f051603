#%%
import asyncio
import json
from datetime import date

from tqdm import tqdm

from camara_client import CamaraAPIClient

#%%

client = CamaraAPIClient(
    timeout=60,
    min_interval=0.1,   # ~10 rps
    max_tries=8,        # retry attempts for 429
    backoff_base=0.75,  # base backoff seconds
    backoff_cap=30.0,   # max backoff sleep
)

#%%
PLENARY = 180  # orgaos id of the Plenário
today = date.today()

votes = asyncio.run(client.bodies.get_votes(
    PLENARY, dataInicio=date(today.year, 1, 1), dataFim=today,
))
print(len(votes), "votes")

# %%

ballots_by_vote = {}
for vote in tqdm(votes):
    ballots = asyncio.run(client.votes.get_ballots(vote.id))
    if ballots:
        ballots_by_vote[vote.id] = [b.raw for b in ballots]

with open(f"ballots_{today.year}.json", "w", encoding="utf-8") as f:
    json.dump(ballots_by_vote, f, ensure_ascii=False, indent=2)
# %%
client.close()
